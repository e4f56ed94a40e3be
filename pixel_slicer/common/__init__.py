"""
Shared configuration and error types
"""
