"""Motocross fantasy league scoring."""
