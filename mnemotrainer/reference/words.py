from __future__ import annotations

"""Fixed word lists used by the word-based variants."""

from typing import Dict, Tuple

WORD_LISTS: Dict[str, Tuple[str, ...]] = {
    "common": (
        "apple", "banana", "car", "dog", "elephant", "flower", "guitar", "house",
        "island", "jacket", "kite", "lamp", "mountain", "notebook", "ocean", "piano",
        "queen", "robot", "star", "tree", "umbrella", "violin", "waterfall", "xylophone",
        "yacht", "zebra", "airplane", "bicycle", "camera", "dragon", "engine", "fire",
        "globe", "hammer", "iceberg", "jungle", "kettle", "lion", "mirror", "nest",
    ),
    "objects": (
        "book", "phone", "key", "wallet", "bottle", "cup", "plate", "fork",
        "spoon", "knife", "chair", "table", "pen", "pencil", "paper", "clock",
        "watch", "glasses", "hat", "shoe", "sock", "shirt", "pants", "bag",
    ),
}
