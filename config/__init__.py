"""
Configuration for Auto MAC Changer.

- settings: fixed paths, service names and defaults
- store: the persisted JSON configuration record
"""
