#!/usr/bin/env python3
"""Start the Kicks Match server after a quick import and config check."""
import sys
import traceback

print("=" * 70)
print("Starting Kicks Match")
print("=" * 70)

print("\n[1/2] Checking app and configuration...")
try:
    from kicks_match.core.config import get_settings
    from kicks_match.main import app

    print(f"✓ App imported: {app.title} v{app.version}")
    if get_settings().gemini_api_key:
        print(f"✓ GEMINI_API_KEY set, model={get_settings().gemini_model}")
    else:
        print("⚠ GEMINI_API_KEY is not set: /api/analyze will answer 500 until it is")
except Exception as e:
    print(f"✗ Import failed: {e}")
    traceback.print_exc()
    sys.exit(1)

print("\n[2/2] Starting server...")
print("=" * 70)
print("Upload page:       http://127.0.0.1:8000/")
print("API Documentation: http://127.0.0.1:8000/docs")
print("=" * 70)
print("\nPress Ctrl+C to stop the server\n")

try:
    import uvicorn

    uvicorn.run(
        "kicks_match.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
        log_level="info",
    )
except KeyboardInterrupt:
    print("\n\nServer stopped by user")
