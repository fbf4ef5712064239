import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field

from ipamctl.webhook.handlers import AdmissionRequest, GroupVersionKind, Operation, handle

logger = logging.getLogger(__name__)

router = APIRouter()


class ReviewKind(BaseModel):
    group: str = ''
    version: str
    kind: str


class ReviewRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    uid: str
    kind: ReviewKind
    operation: Operation
    name: str = ''
    namespace: str = ''
    object: Optional[Dict[str, Any]] = None
    old_object: Optional[Dict[str, Any]] = Field(default=None, alias='oldObject')


class AdmissionReview(BaseModel):
    apiVersion: str = 'admission.k8s.io/v1'
    kind: str = 'AdmissionReview'
    request: Optional[ReviewRequest] = None


@router.post("/validate")
def validate(review: AdmissionReview, http_request: Request):
    if review.request is None:
        raise HTTPException(status_code=400, detail="AdmissionReview has no request")

    req = review.request
    admission_request = AdmissionRequest(
        uid=req.uid,
        kind=GroupVersionKind(req.kind.group, req.kind.version, req.kind.kind),
        operation=req.operation,
        object=req.object,
        old_object=req.old_object,
        name=req.name,
        namespace=req.namespace,
    )
    response = handle(http_request.app.state.registry, admission_request)

    return {
        "apiVersion": review.apiVersion,
        "kind": "AdmissionReview",
        "response": response.to_review_response(req.uid),
    }
