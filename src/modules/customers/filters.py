import django_filters

from modules.customers.models import Customer


class CustomerFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    city = django_filters.CharFilter(field_name="city", lookup_expr="iexact")
    phone = django_filters.CharFilter(method="filter_phone")

    class Meta:
        model = Customer
        fields = ["name", "city", "phone"]

    def filter_phone(self, queryset, name, value):
        return queryset.filter(phone_digits__contains=Customer.sanitize_phone(value))
