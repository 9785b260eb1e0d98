"""
Snippet endpoints.

Home page listing, single snippet view and snippet creation.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse

from snippetbox.api.dependencies import get_current_user_id, get_snippet_repository
from snippetbox.db.repositories import SnippetRepository
from snippetbox.schemas.snippet import SnippetCreate, SnippetResponse

router = APIRouter()


@router.get("/",
            summary="Latest active snippets.",
            response_model=list[SnippetResponse])
def home(snippets: SnippetRepository = Depends(get_snippet_repository)):
    return snippets.latest()


@router.get("/snippet/view/{snippet_id}",
            summary="View a single snippet.",
            response_model=SnippetResponse)
def snippet_view(snippet_id: str, snippets: SnippetRepository = Depends(get_snippet_repository)):
    """
    Show an active snippet.

    Malformed ids, missing snippets and expired snippets all give 404.
    """
    try:
        parsed_id = int(snippet_id)
    except ValueError:
        parsed_id = 0
    if parsed_id < 1:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return snippets.get(parsed_id)


@router.post("/snippet/create",
             summary="Create a snippet.",
             status_code=status.HTTP_303_SEE_OTHER,
             response_class=RedirectResponse,
             dependencies=[Depends(get_current_user_id)])
def snippet_create_post(data: SnippetCreate,
                        snippets: SnippetRepository = Depends(get_snippet_repository)):
    snippet_id = snippets.insert(data.title, data.content, data.expires)
    return RedirectResponse(url=f"/snippet/view/{snippet_id}", status_code=status.HTTP_303_SEE_OTHER)
