"""Configuration: settings, logging, and domain config discovery."""
