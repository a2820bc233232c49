"""Classroom management utilities."""

from typing import List

from campus_scheduler.core.context import RequestContext
from campus_scheduler.models import ClassroomModel
from campus_scheduler.utils.record_manager import RecordManager


class ClassroomManager(RecordManager):
    """Manages classroom operations. Writes require an admin profile."""

    model = ClassroomModel
    updatable_fields = (
        "room_name",
        "capacity",
        "equipment",
        "location",
        "availability_status",
        "remarks",
    )

    def list_classrooms(
        self, ctx: RequestContext, available_only: bool = False
    ) -> List[ClassroomModel]:
        query = self.visible(ctx)
        if available_only:
            query = query.filter(ClassroomModel.availability_status.is_(True))
        return query.order_by(ClassroomModel.room_name).all()

    def get_classroom(self, ctx: RequestContext, classroom_id: str) -> ClassroomModel:
        return self.get(ctx, classroom_id)

    def create_classroom(self, ctx: RequestContext, **fields) -> ClassroomModel:
        return self.create(ctx, **fields)

    def update_classroom(self, ctx: RequestContext, classroom_id: str, **changes) -> ClassroomModel:
        return self.update(ctx, classroom_id, **changes)

    def delete_classroom(self, ctx: RequestContext, classroom_id: str) -> None:
        self.delete(ctx, classroom_id)
