# models_bootstrap.py
from company import models as _company_models
from user import models as _user_models
from cleaner import models as _cleaner_models
from availability import models as _availability_models
from workschedule import models as _workschedule_models
from dateoverride import models as _dateoverride_models
from assignment import models as _assignment_models
