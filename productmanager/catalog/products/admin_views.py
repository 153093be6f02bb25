"""Server-rendered admin pages for the product catalog."""
import logging
import math

from django.contrib import messages
from django.http import Http404
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods, require_POST

from productmanager.platform.accounts.auth import admin_required
from .filters import UI_PAGE_SIZE, ProductFilter
from .forms import ProductForm
from .results import Outcome
from .serializers import ProductListQuerySerializer
from .services import ProductService

logger = logging.getLogger(__name__)


def _form_payload(form):
    data = dict(form.cleaned_data)
    data["description"] = data.get("description") or None
    return data


def _listing_filter(request):
    query = ProductListQuerySerializer(data=request.GET.dict())
    if query.is_valid():
        return query.to_filter(default_page_size=UI_PAGE_SIZE)
    logger.warning("Ignoring invalid listing parameters: %s", dict(query.errors))
    return ProductFilter(default_page_size=UI_PAGE_SIZE)


@admin_required
def product_list(request):
    product_filter = _listing_filter(request)
    page = ProductService().list_products(product_filter)
    total_pages = math.ceil(page.total_count / product_filter.page_size)

    return render(request, "products/index.html", {
        "products": page.products,
        "total_count": page.total_count,
        "sort_by": product_filter.sort_field,
        "ascending": not product_filter.descending,
        "page": product_filter.page,
        "page_size": product_filter.page_size,
        "total_pages": total_pages,
        "page_numbers": range(1, total_pages + 1),
    })


@admin_required
@require_http_methods(["GET", "POST"])
def product_create(request):
    if request.method == "GET":
        return render(request, "products/form.html", {"form": ProductForm(), "mode": "create"})

    form = ProductForm(request.POST)
    if form.is_valid():
        result = ProductService().create_product(_form_payload(form))
        if result.ok:
            messages.success(request, f"Product \"{result.value['name']}\" created.")
            return redirect("products:index")
        if result.outcome is Outcome.INVALID:
            form.apply_errors(result.errors)
        else:
            messages.error(request, "The product could not be saved. Please try again.")

    return render(request, "products/form.html", {"form": form, "mode": "create"})


@admin_required
@require_http_methods(["GET", "POST"])
def product_edit(request, product_id):
    service = ProductService()

    if request.method == "GET":
        product = service.get_product(product_id)
        if product is None:
            raise Http404("Product not found")
        return render(request, "products/form.html", {
            "form": ProductForm.from_product(product),
            "mode": "edit",
            "product_id": product_id,
        })

    form = ProductForm(request.POST)
    if form.is_valid():
        result = service.update_product(product_id, _form_payload(form))
        if result.ok:
            messages.success(request, f"Product \"{result.value['name']}\" updated.")
            return redirect("products:index")
        if result.outcome is Outcome.NOT_FOUND:
            raise Http404("Product not found")
        if result.outcome is Outcome.INVALID:
            form.apply_errors(result.errors)
        else:
            messages.error(request, "The product could not be saved. Please try again.")

    return render(request, "products/form.html", {"form": form, "mode": "edit", "product_id": product_id})


@admin_required
@require_POST
def product_delete(request, product_id):
    result = ProductService().delete_product(product_id)
    if result.ok:
        messages.success(request, "Product deleted.")
    elif result.outcome is Outcome.NOT_FOUND:
        messages.warning(request, "Product was already removed.")
    else:
        messages.error(request, "The product could not be deleted. Please try again.")
    return redirect("products:index")


@admin_required
@require_POST
def product_toggle_status(request, product_id):
    result = ProductService().toggle_product_status(product_id)
    if result.outcome is Outcome.NOT_FOUND:
        raise Http404("Product not found")
    if result.ok:
        state = "on sale" if result.value["isActive"] else "off sale"
        messages.success(request, f"Product \"{result.value['name']}\" is now {state}.")
    else:
        messages.error(request, "The product status could not be changed. Please try again.")
    return redirect("products:index")


def home(request):
    return redirect("products:index")
