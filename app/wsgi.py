from app.main import app
from mangum import Mangum

# ASGI handler for serverless deployment (AWS Lambda / Vercel)
handler = Mangum(app, lifespan="off")

if __name__ == "__main__":
    import uvicorn
    from app.config import HOST, PORT
    uvicorn.run(app, host=HOST, port=PORT)
