"""Infrastructure: configuration, logging and MongoDB connectivity."""
