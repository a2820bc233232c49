"""Course management utilities."""

from typing import List, Optional

from campus_scheduler.core.context import RequestContext
from campus_scheduler.models import CourseModel
from campus_scheduler.utils.record_manager import RecordManager


class CourseManager(RecordManager):
    """Manages course operations. Writes require an admin profile."""

    model = CourseModel
    updatable_fields = ("course_code", "course_name", "department", "credits", "description")

    def list_courses(
        self, ctx: RequestContext, department: Optional[str] = None
    ) -> List[CourseModel]:
        query = self.visible(ctx)
        if department:
            query = query.filter(CourseModel.department == department)
        return query.order_by(CourseModel.course_code).all()

    def get_course(self, ctx: RequestContext, course_id: str) -> CourseModel:
        return self.get(ctx, course_id)

    def create_course(self, ctx: RequestContext, **fields) -> CourseModel:
        # Omitted credits fall back to the column default of 3
        if fields.get("credits") is None:
            fields.pop("credits", None)
        return self.create(ctx, **fields)

    def update_course(self, ctx: RequestContext, course_id: str, **changes) -> CourseModel:
        return self.update(ctx, course_id, **changes)

    def delete_course(self, ctx: RequestContext, course_id: str) -> None:
        self.delete(ctx, course_id)
