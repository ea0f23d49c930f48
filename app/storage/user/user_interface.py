from typing import Optional, Protocol

from app.schemas.user import UserCreate, UserOut, UserAllOut


class IUserRepository(Protocol):
    """
    用户仓库接口协议（数据层抽象接口）
    业务层依赖本接口，而不是具体实现，方便替换数据源或在测试中使用内存实现
    """

    def get_user_by_id(self, user_id: int) -> Optional[UserOut]:
        """根据 id 查询用户，不存在返回 None"""
        ...

    def get_user_by_username(self, username: str) -> Optional[UserAllOut]:
        """根据用户名查询用户（包含密码哈希，仅供登录使用）"""
        ...

    def create_user(self, user_data: UserCreate) -> UserOut:
        """
        创建用户
        注意：此处假定 user_data.password 已经是哈希后的密码（业务层负责加密）
        """
        ...
