"""Coaching rules — one module per recommendation concern."""
