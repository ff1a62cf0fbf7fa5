"""Practice variants: one plugin per mnemonic technique."""
