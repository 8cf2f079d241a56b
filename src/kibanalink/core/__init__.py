"""Core domain: request models, configuration, encoders and the URL builder."""
