from datetime import datetime, timezone


def now_utc():
    """返回当前 UTC 时间（带时区）"""
    return datetime.now(timezone.utc)
