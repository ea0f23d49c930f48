from contextlib import contextmanager

from sqlalchemy.orm import Session


@contextmanager
def transaction(db: Session):
    """
    写操作统一包一层：
    - 正常结束 commit
    - 出现异常 rollback 并继续向上抛出
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
