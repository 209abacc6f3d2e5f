"""Backend API application."""
