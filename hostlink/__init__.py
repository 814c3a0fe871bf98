"""Containers and LED, button and joystick models for controller firmware logic."""

__version__ = "0.1.0"