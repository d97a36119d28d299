"""Storifal API - account registration with email verification, login and contact form."""
