"""Static landing page generator for a magazine's published issues."""
