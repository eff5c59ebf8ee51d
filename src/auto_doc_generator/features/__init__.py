"""Feature modules for auto-doc-generator."""
