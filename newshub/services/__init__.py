"""Business logic between the API routers and the remote stores."""
