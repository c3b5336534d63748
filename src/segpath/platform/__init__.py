"""Platform adapters: logging and the host filesystem."""
