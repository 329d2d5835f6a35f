from .user import User
from .proposal import Proposal
from .evaluator import Evaluator
from .evaluation import Evaluation
from .conference_session import ConferenceSession
from .notification import Notification
