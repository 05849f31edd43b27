"""AI Social Post Automator backend."""
