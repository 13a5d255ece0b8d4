"""Branding preference management utilities and service entry point."""

