"""Configuration and logging shared by the catalogue and its command line."""
