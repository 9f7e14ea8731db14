import django_filters

from modules.products.models import Product


class ProductFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    unit = django_filters.CharFilter(field_name="unit", lookup_expr="iexact")
    min_price = django_filters.NumberFilter(
        field_name="price_per_unit", lookup_expr="gte"
    )
    max_price = django_filters.NumberFilter(
        field_name="price_per_unit", lookup_expr="lte"
    )

    class Meta:
        model = Product
        fields = ["name", "unit", "min_price", "max_price"]
