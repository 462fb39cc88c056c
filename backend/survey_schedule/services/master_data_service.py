"""Reference lists used to populate form choices"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from survey_schedule.models.equipment import Equipment
from survey_schedule.models.status import Status
from survey_schedule.models.user import User


class MasterDataService:
    """Read access to the equipment, status and user master tables"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_equipment(self) -> List[Equipment]:
        result = await self.db.execute(select(Equipment).order_by(Equipment.id))
        return list(result.scalars().all())

    async def list_statuses(self) -> List[Status]:
        """Statuses in display order"""
        result = await self.db.execute(select(Status).order_by(Status.sort_order, Status.id))
        return list(result.scalars().all())

    async def list_users(self) -> List[User]:
        result = await self.db.execute(select(User).order_by(User.id))
        return list(result.scalars().all())
