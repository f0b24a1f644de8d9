"""Small helpers shared by the core, GUI and CLI."""
