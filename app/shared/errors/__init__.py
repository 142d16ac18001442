"""
Exception handlers that turn admin and showcase errors into the
``{success: false, message}`` JSON envelope.
"""
