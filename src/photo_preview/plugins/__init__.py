"""Route plugins discovered through the photo_preview.routes entry-point group."""
