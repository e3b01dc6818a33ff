"""ORM row -> application DTO mapping shared by the repositories."""

from catalog.application.dtos.category import CategoryResult, FilterResult
from catalog.application.dtos.favorite import FavoriteResult
from catalog.application.dtos.item import (
    CategoryRef,
    ItemAttributeResult,
    ItemResult,
    ItemSummary,
    RelatedProductResult,
)
from catalog.application.dtos.order import OrderItemResult, OrderResult
from catalog.application.dtos.promotion import PromotionItemResult, PromotionResult
from catalog.infrastructure.persistence.models import (
    Category,
    Favorite,
    Filter,
    Item,
    ItemAttribute,
    Order,
    Promotion,
    PromotionItem,
    RelatedProduct,
)


def item_summary(i: Item) -> ItemSummary:
    return ItemSummary(
        id=i.id, title=i.title, price=i.price, src=i.src, alt=i.alt, in_stock=i.in_stock
    )


def attribute_result(a: ItemAttribute) -> ItemAttributeResult:
    return ItemAttributeResult(id=a.id, name=a.name, value=a.value, item_id=a.item_id)


def item_result(i: Item) -> ItemResult:
    """Map ORM Item (with labels, categories, attributes loaded) to ItemResult."""
    return ItemResult(
        id=i.id,
        title=i.title,
        article=i.article,
        description=i.description,
        price=i.price,
        quantity_in_stock=i.quantity_in_stock,
        in_stock=i.in_stock,
        src=i.src,
        alt=i.alt,
        parent_item_id=i.parent_item_id,
        labels=sorted(lbl.label for lbl in i.labels),
        categories=[CategoryRef(slug=c.slug, title=c.title) for c in i.categories],
        attributes=[attribute_result(a) for a in i.attributes],
        created_at=i.created_at,
        updated_at=i.updated_at,
    )


def related_result(r: RelatedProduct) -> RelatedProductResult:
    return RelatedProductResult(
        id=r.id, item_id=r.item_id, related_item=item_summary(r.related_item)
    )


def filter_result(f: Filter) -> FilterResult:
    return FilterResult(
        id=f.id,
        name=f.name,
        values=list(f.values or []),
        filter_type=f.filter_type,
        min_value=f.min_value,
        max_value=f.max_value,
        category_slug=f.category_slug,
    )


def category_result(c: Category) -> CategoryResult:
    return CategoryResult(
        slug=c.slug,
        title=c.title,
        product_quantity=c.product_quantity,
        src=c.src,
        alt=c.alt,
        parent_slug=c.parent_slug,
        filters=[filter_result(f) for f in c.filters],
        created_at=c.created_at,
        updated_at=c.updated_at,
    )


def promotion_result(p: Promotion) -> PromotionResult:
    return PromotionResult(
        slug=p.slug,
        title=p.title,
        description=p.description,
        src=p.src,
        alt=p.alt,
        lasts_to=p.lasts_to,
        created_at=p.created_at,
        updated_at=p.updated_at,
    )


def promotion_item_result(pi: PromotionItem) -> PromotionItemResult:
    return PromotionItemResult(
        id=pi.id,
        discount=pi.discount,
        promotion_slug=pi.promotion_slug,
        item=item_summary(pi.item),
    )


def order_result(o: Order) -> OrderResult:
    return OrderResult(
        id=o.id,
        status=o.status,
        total_amount=o.total_amount,
        fio=o.fio,
        tel=o.tel,
        email=o.email,
        address=o.address,
        delivery=o.delivery,
        payment_method=o.payment_method,
        user_id=o.user_id,
        items=[
            OrderItemResult(id=oi.id, quantity=oi.quantity, item=item_summary(oi.item))
            for oi in o.items
        ],
        created_at=o.created_at,
        updated_at=o.updated_at,
    )


def favorite_result(f: Favorite) -> FavoriteResult:
    return FavoriteResult(
        id=f.id,
        user_id=f.user_id,
        item_id=f.item_id,
        item=item_summary(f.item) if f.item is not None else None,
        created_at=f.created_at,
    )
