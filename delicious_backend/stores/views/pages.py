# stores/views/pages.py

"""
STORE PAGES (server-rendered)

- GET      /  and /stores/                -> listing, page 1
- GET      /stores/page/<n>/              -> listing, page n
- GET/POST /add/                          -> create (login required)
- GET      /stores/<pk>/edit/             -> edit form (author only)
- POST     /add/<pk>/                     -> update (author only)
- GET      /store/<slug>/                 -> detail with reviews
- GET      /tags/  /tags/<tag>/           -> tag histogram + stores
- GET      /top/                          -> top rated stores
- GET      /map/                          -> map page
- GET      /hearts/                       -> hearted stores (login required)
"""

from __future__ import annotations

from django.contrib import messages
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from reviews.forms import ReviewForm
from stores.forms import StoreForm
from stores.models import Store
from stores.services.exceptions import PhotoTypeError
from stores.services.ownership import confirm_owner
from stores.services.pagination import paginate_stores
from stores.services.photos import save_photo
from stores.services.store_service import save_store
from users.decorators import login_required
from users.services.hearts import hearted_stores


def _render_store_form(request, form, *, title, store=None):
    return render(
        request,
        "stores/edit_store.html",
        {"title": title, "form": form, "store": store},
    )


def _persist(request, form, *, author=None):
    """
    Save a valid StoreForm. Returns the store, or None if the photo was
    rejected (the error is attached to the form's photo field).
    """
    store = form.save(commit=False)

    upload = form.cleaned_data.get("photo")
    if upload:
        try:
            store.photo = save_photo(upload)
        except PhotoTypeError as exc:
            form.add_error("photo", str(exc))
            return None

    return save_store(store=store, author=author, tag_names=form.cleaned_data["tags"])


@require_GET
def store_list(request, page=1):
    listing = paginate_stores(page)

    if listing.is_out_of_range:
        messages.info(
            request,
            f"You asked for page {page} but that doesn't exist. "
            f"I put you on page {listing.redirect_page}.",
        )
        return redirect("stores:page", page=listing.redirect_page)

    return render(
        request,
        "stores/stores.html",
        {
            "title": "Stores",
            "stores": listing.stores,
            "page": listing.page,
            "pages": listing.pages,
            "count": listing.count,
        },
    )


@login_required
@require_http_methods(["GET", "POST"])
def add_store(request):
    if request.method == "GET":
        return _render_store_form(request, StoreForm(), title="Add Store")

    form = StoreForm(request.POST, request.FILES)
    store = _persist(request, form, author=request.user) if form.is_valid() else None
    if store is None:
        return _render_store_form(request, form, title="Add Store")

    messages.success(
        request, f"Successfully created {store.name}. Care to leave a review?"
    )
    return redirect("stores:detail", slug=store.slug)


@login_required
@require_GET
def edit_store(request, pk):
    store = get_object_or_404(Store, pk=pk)
    confirm_owner(store, request.user)
    return _render_store_form(
        request, StoreForm(instance=store), title=f"Edit {store.name}", store=store
    )


@login_required
@require_POST
def update_store(request, pk):
    store = get_object_or_404(Store, pk=pk)
    confirm_owner(store, request.user)

    form = StoreForm(request.POST, request.FILES, instance=store)
    saved = _persist(request, form) if form.is_valid() else None
    if saved is None:
        return _render_store_form(
            request, form, title=f"Edit {store.name}", store=store
        )

    messages.success(request, f"Successfully updated {saved.name}.")
    return redirect("stores:edit", pk=saved.pk)


@require_GET
def store_detail(request, slug):
    store = get_object_or_404(Store.objects.with_reviews(), slug=slug)
    return render(
        request,
        "stores/store.html",
        {"title": store.name, "store": store, "review_form": ReviewForm()},
    )


@require_GET
def stores_by_tag(request, tag=None):
    tags = Store.objects.tags_list()

    stores = Store.objects.with_reviews()
    if tag:
        stores = stores.filter(tags__name=tag)
    else:
        stores = stores.filter(tags__isnull=False).distinct()

    return render(
        request,
        "stores/tag.html",
        {"title": "Tags", "tags": tags, "stores": stores, "tag": tag},
    )


@require_GET
def top_stores(request):
    return render(
        request,
        "stores/top_stores.html",
        {"title": "⭐ Top Stores!", "stores": Store.objects.top_stores()},
    )


@require_GET
def map_page(request):
    return render(request, "stores/map.html", {"title": "Map"})


@login_required
@require_GET
def hearts_page(request):
    return render(
        request,
        "stores/stores.html",
        {"title": "Hearted Stores", "stores": hearted_stores(request.user)},
    )
