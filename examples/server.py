# server.py

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

app = FastAPI()

@app.post("/chat")
async def chat(request: Request):
    """
    Stub responder: echoes the user's text back with a markdown link.

    Send "fail" to get a 500 and exercise the widget's error path.
    """
    body = await request.json()
    text = body.get('chatInput', '')
    session_id = body.get('sessionId', '')

    print(f"Session: {session_id}, action: {body.get('action')}")

    if text.strip().lower() == 'fail':
        return JSONResponse({'error': 'requested failure'}, status_code=500)

    return {
        'output': f'Echo: {text}. Read more [here](https://example.com/?q={len(text)}).'
    }

if __name__ == "__main__":
    print("\n=== Chat widget stub responder ===")
    print("Endpoint: http://127.0.0.1:8000/chat\n")
    uvicorn.run("server:app", host="127.0.0.1", port=8000, reload=True, reload_dirs=["./"])
