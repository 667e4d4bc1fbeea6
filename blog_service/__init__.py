"""Blog content service: blog posts with externally stored photos and cascading comments."""
