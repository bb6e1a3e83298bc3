from app.models.activity import Activity
from app.repositories.base import CrudRepository

activity_repository = CrudRepository(Activity)
