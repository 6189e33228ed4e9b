"""HTTP endpoints of the explorer app."""

import json
import logging
from typing import Any

from django.conf import settings
from django.contrib.messages import get_messages
from django.core.exceptions import ValidationError
from django.http import (
    Http404,
    HttpRequest,
    HttpResponse,
    HttpResponseBadRequest,
    HttpResponseRedirect,
    JsonResponse,
)
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from server.apps.explorer.actions import action_tag
from server.apps.explorer.exceptions import MalformedClickError
from server.apps.explorer.infrastructure.navigation import ClientInstructions
from server.apps.explorer.logic.classifier import classify
from server.apps.explorer.logic.dispatcher import dispatch
from server.apps.explorer.logic.link_builder import LinkBuilder
from server.apps.explorer.logic.sharing import copy_share_link
from server.apps.explorer.records import FileRecord, NavigationContext

logger = logging.getLogger(__name__)


def _load_json(request: HttpRequest) -> dict[str, Any]:
    if not request.body:
        return {}
    try:
        body = json.loads(request.body)
    except (UnicodeDecodeError, json.JSONDecodeError) as error:
        raise MalformedClickError('Request body is not valid JSON') from error
    if not isinstance(body, dict):
        raise MalformedClickError('Request body must be a JSON object')
    return body


def _parse_click(
    body: dict[str, Any],
) -> tuple[FileRecord, NavigationContext, list[FileRecord], int]:
    raw_record = body.get('record')
    if not isinstance(raw_record, dict):
        raise MalformedClickError('Click needs a record object')

    raw_siblings = body.get('fileList') or []
    if not isinstance(raw_siblings, list) or not all(
        isinstance(item, dict) for item in raw_siblings
    ):
        raise MalformedClickError('fileList must be a list of records')

    try:
        index = int(body.get('index') or 0)
    except (TypeError, ValueError) as error:
        raise MalformedClickError('index must be an integer') from error

    context = NavigationContext.from_query(
        body,
        route_name=body.get('routeName'),
    )
    siblings = [FileRecord.from_api(item) for item in raw_siblings]
    return FileRecord.from_api(raw_record), context, siblings, index


# Click and copy endpoints only compute instructions, nothing is written
@csrf_exempt
@require_POST
def file_click(request: HttpRequest) -> HttpResponse:
    """Resolve a click on a file or folder into client instructions.

    Args:
        request: POST with ``record``, ``index``, ``fileList``,
            ``fileType`` and ``routeName``.

    Returns:
        JSON with the action tag and the instructions to run.
    """
    try:
        record, context, siblings, index = _parse_click(_load_json(request))
    except MalformedClickError as error:
        logger.warning('Rejected click payload: %s', error)
        return HttpResponseBadRequest(str(error))

    action = classify(record, context, siblings, index)
    instructions = ClientInstructions(current_path=_page_path(request))
    try:
        handled = dispatch(
            action,
            LinkBuilder.from_request(request),
            navigator=instructions,
            previews=instructions,
        )
    except ValidationError as error:
        reason = '; '.join(error.messages)
        logger.warning('Cannot run %s for click: %s', action_tag(action), reason)
        return HttpResponseBadRequest(reason)

    return JsonResponse({
        'action': action_tag(action),
        'handled': handled,
        'instructions': instructions.as_list(),
    })


def _page_path(request: HttpRequest) -> str:
    # The SPA sends the page path so pushed locations resolve against it
    return request.headers.get('X-Page-Path', '')


@require_GET
def editor_handoff(request: HttpRequest) -> HttpResponse:
    """Forward an editor handoff to the document editing service.

    Args:
        request: GET carrying the handoff query.

    Returns:
        Redirect to the editing service with the same query.

    Raises:
        Http404: If no editing service is configured.
    """
    editor_url = getattr(settings, 'EXPLORER_EDITOR_URL', '')
    if not editor_url:
        raise Http404('Document editing service is not configured')

    query_string = request.META.get('QUERY_STRING', '')
    target = f'{editor_url}?{query_string}' if query_string else editor_url
    logger.info('Forwarding editor handoff (%s)', request.GET.get('ot', ''))
    return HttpResponseRedirect(target)


@csrf_exempt
@require_POST
def share_link_copy(request: HttpRequest, share_batch_num: str) -> HttpResponse:
    """Queue the share text for a batch for the browser's clipboard.

    The copy itself happens in the browser, which reports the outcome,
    so no success message is added here.

    Args:
        request: POST with an optional ``extractionCode``.
        share_batch_num: Share batch identifier.

    Returns:
        JSON with the queue result, instructions and user messages.
    """
    try:
        body = _load_json(request)
    except MalformedClickError as error:
        return HttpResponseBadRequest(str(error))

    instructions = ClientInstructions()
    queued = copy_share_link(
        request,
        instructions,
        share_batch_num,
        body.get('extractionCode'),
        success_message=None,
    )

    return JsonResponse({
        'queued': queued,
        'instructions': instructions.as_list(),
        'messages': [
            {'level': message.level_tag, 'message': message.message}
            for message in get_messages(request)
        ],
    })
