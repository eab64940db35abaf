from __future__ import annotations
from sqlalchemy.orm import Session

def commit_refresh(db: Session, obj):
    try:
        db.add(obj)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(obj)
    return obj
