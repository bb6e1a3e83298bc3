from datetime import date
from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile
from sqlalchemy.orm import Session

from app.api.auth import get_current_user
from app.api.crud import build_crud_router
from app.api.deps import get_db_dependency
from app.core.config import settings
from app.core.errors import bad_request_alert
from app.core.headers import entity_creation_alert
from app.core.storage import delete_project_pic, save_project_pic
from app.models.project import Project, ProjectActivity, ProjectPic
from app.models.user import User
from app.repositories.activity import activity_repository
from app.repositories.customer import customer_repository
from app.repositories.project import project_repository, project_pic_repository, project_activity_repository
from app.repositories.provider import provider_repository
from app.schemas.project import (
	ProjectIn, ProjectRead,
	ProjectPicIn, ProjectPicRead,
	ProjectActivityIn, ProjectActivityRead,
)

ENTITY_NAME = "project"

logger = logging.getLogger(__name__)


def stamp_date_send(db: Session, project: Project) -> None:
	"""New projects are dated by the server, whatever the client sent."""
	project.date_send = date.today()


def keep_date_send(db: Session, project: Project) -> None:
	if project.date_send is not None:
		return
	existing = db.get(Project, project.id)
	project.date_send = existing.date_send if existing is not None else date.today()


def remove_pic_file(pic: ProjectPic) -> None:
	delete_project_pic(pic.link)


crud_router = build_crud_router(
	path="projects",
	entity_name=ENTITY_NAME,
	repository=project_repository,
	schema_in=ProjectIn,
	schema_read=ProjectRead,
	on_create=stamp_date_send,
	on_update=keep_date_send,
)

pic_router = build_crud_router(
	path="project-pics",
	entity_name="projectPic",
	repository=project_pic_repository,
	schema_in=ProjectPicIn,
	schema_read=ProjectPicRead,
	on_delete=remove_pic_file,
)

activity_router = build_crud_router(
	path="project-activities",
	entity_name="projectActivity",
	repository=project_activity_repository,
	schema_in=ProjectActivityIn,
	schema_read=ProjectActivityRead,
)

router = APIRouter()
router.include_router(crud_router)
router.include_router(pic_router)
router.include_router(activity_router)


def parse_activity_ids(values: List[str]) -> List[int]:
	"""
	Accept both repeated form fields and comma separated lists ("1,2").

	Raises:
		HTTPException: 400 when a value is not an integer
	"""
	ids = []
	for value in values:
		for part in value.split(","):
			part = part.strip()
			if not part:
				continue
			try:
				ids.append(int(part))
			except ValueError:
				raise bad_request_alert(ENTITY_NAME, "activitynotfound", f"Unknown activity: {part}")
	return ids


@router.get("/eligiblePojects", response_model=List[ProjectRead])
def get_eligible_projects(
	current_user: User = Depends(get_current_user),
	db: Session = Depends(get_db_dependency)
):
	"""Projects requiring at least one of the activities offered by the logged-in provider."""
	logger.debug("REST request to get eligible Projects")
	logger.debug(f"id User logged : {current_user.id}")
	provider = provider_repository.find_by_user_id(db, current_user.id)
	if provider is None:
		return []
	activity_ids = provider_repository.activity_ids_of(db, provider.id)
	projects = project_repository.find_by_activities_in(db, activity_ids)
	return [ProjectRead.model_validate(p) for p in projects]


@router.get("/myProjects", response_model=List[ProjectRead])
def get_my_projects(
	current_user: User = Depends(get_current_user),
	db: Session = Depends(get_db_dependency)
):
	"""Projects posted by the logged-in customer."""
	logger.debug("REST request to get all my Projects (customer)")
	customer = customer_repository.find_by_user_id(db, current_user.id)
	if customer is None:
		return []
	return [ProjectRead.model_validate(p) for p in project_repository.find_by_customer(db, customer.id)]


@router.post("/create-new-project", response_model=ProjectRead, status_code=201)
def create_new_project(
	response: Response,
	title: str = Form(...),
	description: str = Form(...),
	activities: List[str] = Form(default=[]),
	images: Optional[List[UploadFile]] = File(default=None),
	current_user: User = Depends(get_current_user),
	db: Session = Depends(get_db_dependency)
):
	"""
	Create a project for the logged-in customer with its photos and activities.

	The project takes the customer's address. Photos are stored one by one: a
	photo that cannot be written is logged and skipped, the project and the
	other attachments are kept.
	"""
	logger.debug(f"REST request to save Project : {title} {description}")
	customer = customer_repository.find_by_user_id(db, current_user.id)
	if customer is None:
		raise bad_request_alert(ENTITY_NAME, "nocustomer", "Only customers can create projects")

	activity_ids = parse_activity_ids(activities)
	found = {a.id for a in activity_repository.find_all_by_ids(db, activity_ids)}
	missing = [i for i in activity_ids if i not in found]
	if missing:
		raise bad_request_alert(ENTITY_NAME, "activitynotfound", f"Unknown activity: {missing[0]}")

	project = project_repository.save(db, Project(
		title=title,
		description=description,
		date_send=date.today(),
		street_number=customer.street_number,
		street=customer.street,
		complement_street=customer.complement_street,
		postal_code=customer.postal_code,
		city=customer.city,
		customer_id=customer.id,
	))
	project_id = project.id

	for upload in images or []:
		link = None
		try:
			link = save_project_pic(upload.file, upload.filename)
			project_pic_repository.save(db, ProjectPic(link=link, project_id=project_id))
		except Exception:
			db.rollback()
			if link is not None:
				delete_project_pic(link)
			logger.exception(f"Failed to upload {upload.filename} for project {project_id}")

	for activity_id in activity_ids:
		db.add(ProjectActivity(project_id=project_id, activity_id=activity_id))
	db.commit()

	db.expire_all()
	result = project_repository.find_one(db, project_id)
	response.headers["Location"] = f"{settings.API_PREFIX}/projects/{project_id}"
	response.headers.update(entity_creation_alert(ENTITY_NAME, project_id))
	return ProjectRead.model_validate(result)


@router.post("/get-photo", response_model=List[ProjectPicRead])
def get_project_photos(
	idProject: int = Form(...),
	current_user: User = Depends(get_current_user),
	db: Session = Depends(get_db_dependency)
):
	logger.debug(f"REST request to get photos of Project : {idProject}")
	return [ProjectPicRead.model_validate(p) for p in project_pic_repository.find_by_project(db, idProject)]
