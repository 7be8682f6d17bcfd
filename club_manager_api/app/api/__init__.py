"""
API package containing versioned routes and the error handlers shared
by every version.
"""
