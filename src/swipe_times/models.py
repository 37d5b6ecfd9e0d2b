from enum import Enum

# --- TIMES TABLE BOUNDS ---
TABLE_MIN = 1
TABLE_MAX = 12
TOTAL_FACTS = (TABLE_MAX - TABLE_MIN + 1) ** 2  # 144


class CardPhase(str, Enum):
    """
    Where the current card is in its reveal/grade cycle.
    """
    NO_CARD = "no_card"
    CARD_SHOWN = "card_shown"
    ANSWER_REVEALED = "answer_revealed"
    FINISHED = "finished"


class Grade(str, Enum):
    """
    The learner's self-assessment of a revealed card.
    """
    CORRECT = "correct"
    INCORRECT = "incorrect"


class SwipeDirection(str, Enum):
    LEFT = "left"
    RIGHT = "right"

    def to_grade(self) -> Grade:
        # Left retires the card, right sends it back into the pool
        return Grade.CORRECT if self is SwipeDirection.LEFT else Grade.INCORRECT
