"""
Admin bounded context: domain layer.

Admin accounts, credential errors and the ports used to
verify passwords and issue session tokens.
"""
