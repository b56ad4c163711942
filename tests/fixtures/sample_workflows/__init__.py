"""Sample workflow requests and HTTP steps for the sample API.

``requests`` declares the typed requests and responses; ``steps`` binds each
request to its HTTP method, path and auth. Register the steps on a target
with ``HttpTarget(...).register_module(steps)``.
"""
