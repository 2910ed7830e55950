"""
服务层模块
封装控制台菜单所需的业务逻辑
"""

from .shelter_service import ShelterService

__all__ = ["ShelterService"]
