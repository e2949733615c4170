"""Kernel – error hierarchy shared by every retry_executor layer."""
