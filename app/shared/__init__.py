"""
Cross-cutting pieces wired into the FastAPI app by ``app.main``:
error-to-response mapping, security headers, rate limiting and
logging setup. Nothing here knows about portfolios or admins beyond
the exception types it maps.
"""
