"""
Quick demo script to run the advisor locally.

Starts a uvicorn server with auto-reload and prints the available endpoints.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Algae Biofuel Advisor")
    print("=" * 60)
    print()
    print("📌 Endpoints:")
    print("   - Advisor page:  GET   http://localhost:8000/")
    print("   - Health Check:  GET   http://localhost:8000/health")
    print("   - API key:       PUT   http://localhost:8000/settings/api-key")
    print("   - Form fields:   PATCH http://localhost:8000/form")
    print("   - Algae image:   PUT   http://localhost:8000/form/image")
    print("   - Submit:        POST  http://localhost:8000/form/submit")
    print("   - API Docs:            http://localhost:8000/docs")
    print()
    print("📝 Test with curl:")
    print('   curl -X PUT "http://localhost:8000/settings/api-key" \\')
    print('     -H "Content-Type: application/json" -d \'{"api_key": "<your-key>"}\'')
    print('   curl -X PATCH "http://localhost:8000/form" \\')
    print('     -H "Content-Type: application/json" -d \'{"ph": 7, "harvest_frequency": "Weekly"}\'')
    print('   curl -X POST "http://localhost:8000/form/submit"')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "algae_advisor.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
