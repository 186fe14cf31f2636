"""Feature modules for the jobtracker package."""
