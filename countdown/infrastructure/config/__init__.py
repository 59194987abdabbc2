"""Configuration loading: environment, .env file and YAML config file."""
