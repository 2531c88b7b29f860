import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    default_layout: str = os.getenv("HUMANDISTANCE_LAYOUT", "qwerty")
    min_score: float = float(os.getenv("HUMANDISTANCE_MIN_SCORE", "0.5"))
    keyboard_penalty_strength: float = float(os.getenv("HUMANDISTANCE_KEYBOARD_PENALTY", "0.5"))
    max_candidates: int = int(os.getenv("HUMANDISTANCE_MAX_CANDIDATES", "1000"))
    log_level: str = os.getenv("HUMANDISTANCE_LOG_LEVEL", "INFO")


settings = Settings()
