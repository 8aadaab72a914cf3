"""Project configuration, generation, and PX Blue integration."""
