"""
Environment configuration and logging helpers shared by the woosmap module.
"""
