"""HTTP routers. Each module exposes a ``router`` included by ``app.create_app``."""
