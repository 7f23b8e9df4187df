"""Analysis logger - records analysed hands to a JSON file for later review."""

import json
import os
import uuid
from datetime import datetime
from typing import List, Optional

import structlog

from machi.core.hand import Hand
from machi.core.notation import format_hand, format_tiles
from machi.rules.machi import HandAnalysis

logger = structlog.get_logger()

LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(
    os.path.abspath(__file__)))), "logs")


class AnalysisLogger:
    """Collects one session's analyses and writes them as a JSON log."""

    def __init__(self, config_info: dict, log_dir: Optional[str] = None):
        self.session_id = uuid.uuid4().hex[:12]
        self.timestamp = datetime.now().isoformat()
        self.config_info = config_info
        self.log_dir = log_dir or LOG_DIR
        self.entries: List[dict] = []

    def record(self, hand: Hand, analysis: HandAnalysis) -> dict:
        """Append one analysed hand to the session."""
        entry = {
            "entry_id": uuid.uuid4().hex[:8],
            "hand": format_hand(hand),
            "discards": format_tiles(hand.discard_pool),
            "shanten": analysis.shanten,
            "patterns": sorted({d.pattern.value for d in analysis.decompositions}),
            "conditions": [
                {
                    "discard": condition.discard.name,
                    "waits": {tile.name: count for tile, count in condition.waits.items()},
                    "remaining": condition.remaining,
                    "furiten": condition.furiten,
                }
                for condition in analysis.conditions
            ],
        }
        self.entries.append(entry)
        return entry

    def save(self) -> str:
        """Write the session to ``analysis_<session>.json`` and return its path."""
        log_data = {
            "session_id": self.session_id,
            "timestamp": self.timestamp,
            "config": self.config_info,
            "entries": self.entries,
        }

        os.makedirs(self.log_dir, exist_ok=True)
        filename = f"analysis_{self.session_id}.json"
        filepath = os.path.join(self.log_dir, filename)

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(log_data, f, ensure_ascii=False, indent=2)

        logger.info("analysis log saved", path=filepath, entries=len(self.entries))
        return filepath
