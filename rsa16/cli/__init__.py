"""RSA16 command line interface."""
