"""Commands that add or list donor and patient records."""
