from learnhub.models.user import User  # noqa
from learnhub.models.teacher_request import TeacherRequest  # noqa
from learnhub.models.course import Course  # noqa
from learnhub.models.assignment import Assignment  # noqa
from learnhub.models.payment import Payment  # noqa
from learnhub.models.feedback import Feedback  # noqa
