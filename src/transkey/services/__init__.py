"""Services: settings, file reading and the translation service."""
