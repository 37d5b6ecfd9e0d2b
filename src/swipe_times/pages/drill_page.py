import random
from typing import Optional

from nicegui import ui, events

from swipe_times.components.swipe import SwipeCard
from swipe_times.config import RANDOM_SEED
from swipe_times.pages.common import setup_page, create_navbar
from swipe_times.core.locale_manager import T
from swipe_times.core.log_manager import logger
from swipe_times.models import TOTAL_FACTS, SwipeDirection
from swipe_times.services.drill_service import DrillSession, summarize_report


@ui.page('/')
def drill_page():
    setup_page()
    create_navbar()

    # --- STATE ---
    # One session per client; nothing is shared between browser tabs
    session = DrillSession(rng=random.Random(RANDOM_SEED) if RANDOM_SEED is not None else None)

    # --- UI REFERENCES (bound during layout creation) ---
    question_label: Optional[ui.label] = None
    answer_label: Optional[ui.label] = None
    hint_label: Optional[ui.label] = None
    controls_container: Optional[ui.row] = None
    progress_bar: Optional[ui.linear_progress] = None
    remaining_label: Optional[ui.label] = None
    results_table: Optional[ui.table] = None
    complete_label: Optional[ui.label] = None
    stepper: Optional[ui.stepper] = None

    # --- LOGIC CONTROLLERS ---

    def render_card():
        """Shows the current question with the answer hidden."""
        if question_label: question_label.set_text(session.get_current_question_label())
        if answer_label:
            answer_label.set_text("")
            answer_label.set_visibility(False)
        if hint_label: hint_label.set_visibility(True)
        if controls_container: controls_container.set_visibility(False)

        if progress_bar: progress_bar.set_value(session.get_progress_fraction())
        if remaining_label: remaining_label.set_text(T("cards_remaining", count=session.cards_remaining))

    def show_results():
        report = session.get_session_report()
        if report is None:
            logger.warning("Results requested before the session ended.")
            return

        if progress_bar: progress_bar.set_value(1.0)
        if complete_label: complete_label.set_text(T("session_complete", total=TOTAL_FACTS))
        if results_table:
            results_table.rows = [
                {'metric': T(key), 'value': value} for key, value in summarize_report(report)
            ]
            results_table.update()
        if stepper: stepper.set_value('step_results')

    def reveal():
        if not session.reveal():
            return

        if answer_label:
            answer_label.set_text(str(session.get_current_answer()))
            answer_label.set_visibility(True)
        if hint_label: hint_label.set_visibility(False)
        if controls_container: controls_container.set_visibility(True)

    def grade(direction: SwipeDirection):
        if not session.grade(direction):
            return

        if session.is_finished:
            show_results()
        else:
            render_card()

    def start_run():
        try:
            session.start_session()
        except Exception as e:
            logger.error(f"Session start failed: {e}")
            ui.notify(T("session_start_failed", error=str(e)), type='negative')
            return

        render_card()
        if stepper: stepper.set_value('step_arena')

    # --- KEYBOARD ---
    def handle_key(e: events.KeyEventArguments):
        if not stepper or stepper.value != 'step_arena': return
        if not e.action.keydown: return

        if e.key == ' ' or e.key == 'Enter': reveal()
        elif e.key == 'ArrowLeft': grade(SwipeDirection.LEFT)
        elif e.key == 'ArrowRight': grade(SwipeDirection.RIGHT)

    ui.keyboard(on_key=handle_key)

    # --- LAYOUT ---
    with ui.column().classes('w-screen min-h-screen gradient-bg text-white items-center p-4'):

        ui.label(T("app_subtitle")).classes('text-gray-400 text-sm font-bold tracking-widest uppercase mb-6 text-center')

        with ui.stepper().props('flat animated')\
            .classes('w-full sm:max-w-2xl bg-black/30 border-y sm:border border-white/10 sm:rounded-xl shadow-2xl p-0 sm:p-6') as stepper:

            # --- STEP 1: START ---
            with ui.step(name='step_start', title=T("step_start")).props("icon='play_arrow'"):
                with ui.column().classes('w-full items-center text-center gap-6 py-6'):
                    ui.label(T("app_title")).classes('text-4xl font-black text-indigo-300')
                    ui.label(T("how_to_play")).classes('text-lg text-gray-300 max-w-md')
                    ui.label(T("keyboard_hint")).classes('text-sm italic text-gray-500')
                    ui.button(T("start_button"), on_click=start_run, icon='play_arrow')\
                        .classes('bg-indigo-600 hover:bg-indigo-500 text-white font-bold')

            # --- STEP 2: ARENA ---
            with ui.step(name='step_arena', title=T("step_arena")).props("icon='swipe'"):

                # HUD
                with ui.row().classes('w-full justify-between items-center mb-4 px-4 sm:px-0'):
                    progress_bar = ui.linear_progress(value=0, show_value=False)\
                        .props('size="10px" color="indigo-400" track-color="grey-8" rounded')\
                        .classes('w-2/3')
                    remaining_label = ui.label("").classes('text-xs text-gray-400 font-mono')

                # Card
                with SwipeCard(on_tap=reveal, on_swipe=grade)\
                    .classes('swipe-card w-full min-h-[320px] bg-gray-900 border border-white/20 flex flex-col items-center justify-center p-8 cursor-pointer'):
                    question_label = ui.label("").classes('text-6xl font-black text-white')
                    answer_label = ui.label("").classes('text-5xl font-bold text-green-400 mt-6')
                    answer_label.set_visibility(False)
                    hint_label = ui.label(T("tap_to_reveal")).classes('text-sm text-gray-500 mt-6 animate-pulse')

                # Controls for pointer users; touch users swipe the card
                with ui.row().classes('gap-6 w-full justify-center mt-6') as controls_container:
                    controls_container.set_visibility(False)

                    ui.button(icon='check', on_click=lambda: grade(SwipeDirection.LEFT)) \
                        .props('round color=green-900 size=lg').classes('border border-green-500')\
                        .tooltip(T("mark_correct"))

                    ui.button(icon='close', on_click=lambda: grade(SwipeDirection.RIGHT)) \
                        .props('round color=red-900 size=lg').classes('border border-red-500')\
                        .tooltip(T("mark_wrong"))

            # --- STEP 3: RESULTS ---
            with ui.step(name='step_results', title=T("step_results")).props("icon='emoji_events'"):
                with ui.column().classes('w-full items-center text-center gap-6 py-6'):
                    ui.icon('emoji_events', size='5rem').classes('text-yellow-400 animate-bounce')
                    ui.label(T("results_title")).classes('text-3xl font-black text-white')
                    complete_label = ui.label("").classes('text-lg text-gray-300')

                    columns = [
                        {'name': 'metric', 'label': '', 'field': 'metric', 'align': 'left'},
                        {'name': 'value', 'label': '', 'field': 'value', 'align': 'right'},
                    ]
                    results_table = ui.table(columns=columns, rows=[], row_key='metric')\
                        .props('flat dense hide-header').classes('w-full max-w-md bg-transparent')

                    ui.button(T("play_again"), on_click=start_run, icon='replay')\
                        .classes('bg-indigo-600 text-white px-8 py-2 text-lg font-bold')

