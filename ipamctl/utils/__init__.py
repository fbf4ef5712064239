"""Utility helpers for the ipamctl application."""
