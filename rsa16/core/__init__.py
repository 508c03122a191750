"""Core RSA16 components: configuration, errors, logging and crypto."""
