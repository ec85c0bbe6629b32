"""HTTP side of the app: the ``requests``-based solver client and its errors."""
