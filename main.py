from app.main import app

# uvicorn main:app
# uvicorn main:app --reload
