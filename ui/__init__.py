"""Tkinter front-end for the temperature converter."""
