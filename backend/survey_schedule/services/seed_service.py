"""Development fixtures: master lists and sample projects"""

import logging
from datetime import date
from typing import Dict

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from survey_schedule.models import Equipment, Project, Status, User
from survey_schedule.schemas.common import encode_equipment

logger = logging.getLogger(__name__)

DEFAULT_EQUIPMENT = ["FARO", "Pro2", "Pro3", "RTC", "BLK", "L2pro"]

DEFAULT_STATUSES = [
    ("未見積", 1),
    ("見積済", 2),
    ("日程決", 3),
    ("完了", 4),
    ("ボツ", 5),
]

DEFAULT_USERS = ["管理者", "本井", "山根", "伊藤", "山内", "藤川", "安部", "吉川"]

SAMPLE_PROJECTS = [
    {
        "status": "完了",
        "company_name": "タクマ",
        "site_name": "新江東",
        "equipment": encode_equipment(["FARO"]),
        "photographer": "山根・伊藤",
        "shoot_period": "1/20-1/22",
        "start_date": date(2025, 1, 20),
        "end_date": date(2025, 1, 22),
        "site_address": "東京都江東区夢の島３丁目１",
        "created_by": "管理者",
        "updated_by": "山根",
    },
    {
        "status": "完了",
        "company_name": "タクマ",
        "site_name": "名古屋市猪子石工場",
        "equipment": encode_equipment(["Pro3"]),
        "photographer": "伊藤・本井",
        "shoot_period": "2/3-2/7",
        "start_date": date(2025, 2, 3),
        "end_date": date(2025, 2, 7),
        "remarks": "pro3 ソリューション1台(1/31~2/8)",
        "site_address": "愛知県名古屋市千種区香流橋一丁目１０１",
        "created_by": "管理者",
        "updated_by": "伊藤",
    },
    {
        "status": "日程決",
        "company_name": "新日本空調",
        "site_name": "梅田ダイビル",
        "equipment": encode_equipment(["L2pro"]),
        "photographer": "伊藤・本井",
        "site_address": "大阪府大阪市北区梅田",
        "created_by": "管理者",
        "updated_by": "管理者",
    },
]


async def seed_database(session: AsyncSession, include_samples: bool = True) -> Dict[str, int]:
    """
    Replace all master data (and projects) with the default fixtures.

    Args:
        session: Database session
        include_samples: Also insert the sample projects

    Returns:
        Number of rows created per table
    """
    try:
        # Clear existing data
        for model in (Project, User, Status, Equipment):
            await session.execute(delete(model))

        session.add_all([Equipment(name=name) for name in DEFAULT_EQUIPMENT])
        session.add_all(
            [Status(name=name, sort_order=order) for name, order in DEFAULT_STATUSES]
        )
        session.add_all([User(name=name) for name in DEFAULT_USERS])

        projects = [Project(**values) for values in SAMPLE_PROJECTS] if include_samples else []
        session.add_all(projects)

        await session.commit()
    except Exception:
        await session.rollback()
        raise

    summary = {
        "equipment": len(DEFAULT_EQUIPMENT),
        "statuses": len(DEFAULT_STATUSES),
        "users": len(DEFAULT_USERS),
        "projects": len(projects),
    }
    logger.info(f"Seeded database: {summary}")
    return summary
