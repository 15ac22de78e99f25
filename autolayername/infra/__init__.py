"""Infrastructure adapters: settings persistence and scene document files."""
