from fastapi import Request


def get_db(request: Request):
    db = request.app.state.database.session_factory()
    try:
        yield db
    finally:
        db.close()
