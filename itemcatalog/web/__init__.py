"""Web API for the item catalog."""
