"""Musicare file board backend."""
