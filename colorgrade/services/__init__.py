"""Services used by the conversion pipeline."""
