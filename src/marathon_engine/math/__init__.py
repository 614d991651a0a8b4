"""Closed-form and iterative training math."""
