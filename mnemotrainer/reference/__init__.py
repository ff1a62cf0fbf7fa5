"""Reference tables the practice variants draw their stimuli from."""

from .words import WORD_LISTS  # noqa: F401
