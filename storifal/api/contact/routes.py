"""
Contact API routes.
"""

from fastapi import APIRouter, Depends, status

from storifal.api.dependencies import get_contact_service
from storifal.api.models import ContactOut, ContactRequest, ContactResponse, ErrorResponse
from storifal.domain.contact import ContactService

router = APIRouter(tags=["contact"])

SUBMITTED_MESSAGE = "Contact form submitted successfully"


@router.post(
    "",
    response_model=ContactResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Missing fields"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Submit the contact form",
)
def submit_contact(
    request_data: ContactRequest,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    contact = service.submit(request_data.full_name, request_data.email, request_data.message)
    return ContactResponse(
        message=SUBMITTED_MESSAGE,
        contact=ContactOut(
            id=contact.id,
            full_name=contact.full_name,
            email=contact.email,
            message=contact.message,
            created_at=contact.created_at,
        ),
    )
