"""
Demo application for the proxy pattern.
"""
