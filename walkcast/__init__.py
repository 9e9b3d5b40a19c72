"""Breed-aware dog-walk weather safety scoring."""
