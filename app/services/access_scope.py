# app/services/access_scope.py

import logging

from app.schemas.principal import (
    Principal,
    StudentPrincipal,
    TeacherPrincipal,
    AdminPrincipal,
    AnonymousPrincipal,
)

logger = logging.getLogger(__name__)


async def resolve_course_scope(source, principal: Principal) -> list[str]:
    """
    Определяет ID курсов, события которых видит пользователь.

    - студент: курсы с активной записью;
    - преподаватель: курсы, которые он ведет;
    - администратор: все курсы каталога;
    - аноним или неизвестная роль: пусто, в хранилище не ходим.
    """
    match principal:
        case StudentPrincipal(id=student_id):
            course_ids = await source.get_student_course_ids(student_id)
        case TeacherPrincipal(id=teacher_id):
            course_ids = await source.get_teacher_course_ids(teacher_id)
        case AdminPrincipal():
            course_ids = await source.get_all_course_ids()
        case AnonymousPrincipal():
            course_ids = []
        case _:
            logger.warning(f"Unknown principal type {type(principal).__name__}, scope is empty")
            course_ids = []

    # Убираем дубли, сохраняя порядок
    return list(dict.fromkeys(course_ids))
