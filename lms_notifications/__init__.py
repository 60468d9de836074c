"""Notification and reminder scheduling engine for the learning platform.

The package is split in layers: ``domain`` holds the value types,
``application`` the pure scheduling, composing and filtering rules,
``infrastructure`` the delivery channels and ``interfaces`` the HTTP surface.
"""
