"""
bolagstatus HTTP service.

Import `bolagstatus.service.main` for the FastAPI app.
"""
