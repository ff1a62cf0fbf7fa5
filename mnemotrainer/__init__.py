"""mnemotrainer: timed memorize/recall practice for mnemonic techniques."""

__version__ = "0.1.0"
