from __future__ import annotations

import random
from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.utils import timezone

from modules.customers.models import Customer
from modules.orders.dtos import CreateOrderDTO, OrderItemDTO
from modules.orders.exceptions import DuplicateOrderItem
from modules.orders.models import Order
from modules.orders.services import build_order_service
from modules.products.models import Product, ProductUnit


class Command(BaseCommand):
    help = "Seed database with realistic development data."

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        users_created = self._seed_users()
        customers = self._seed_customers()
        products = self._seed_products()
        orders_created = self._seed_orders(customers, products)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"customers={len(customers)}, "
                f"products={len(products)}, "
                f"orders={orders_created}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        created = 0
        if not User.objects.filter(username="admin").exists():
            User.objects.create_superuser("admin", password="admin123")
            created += 1
        if not User.objects.filter(username="delivery").exists():
            User.objects.create_user("delivery", password="delivery123")
            created += 1
        return created

    def _seed_customers(self) -> list[Customer]:
        self.stdout.write("Creating customers...")
        customers: list[Customer] = []
        seed_customers = [
            ("Asha Patel", "98250 11111", "12 Nilkanth Society", "Rajkot", "360005"),
            ("Bharat Shah", "98250 22222", "4 Gokul Park, Kalawad Road", "Rajkot", "360001"),
            ("Chetna Joshi", "98250 33333", "77 Shanti Nagar", "Gondal", "360311"),
            ("Dinesh Mehta", "98250 44444", "9 Radhe Krishna Flats", "Rajkot", "360004"),
            ("Ela Trivedi", "98250 55555", "21 Sardar Baug", "Morbi", "363641"),
            ("Farhan Kureshi", "98250 66666", "3 Station Road", "Jetpur", "360370"),
        ]
        for name, phone, address, city, postal_code in seed_customers:
            customer, _ = Customer.objects.get_or_create(
                phone=phone,
                defaults={
                    "name": name,
                    "address_line1": address,
                    "city": city,
                    "state_or_province": "Gujarat",
                    "postal_code": postal_code,
                },
            )
            customers.append(customer)
        self.stdout.write(self.style.SUCCESS("Creating customers... Done!"))
        return customers

    def _seed_products(self) -> list[Product]:
        self.stdout.write("Creating products...")
        products: list[Product] = []
        catalog = [
            ("A2 Gir Cow Milk", ProductUnit.LITER, Decimal("8.00"), "Fresh, unprocessed."),
            ("Bilona Ghee", ProductUnit.KG, Decimal("25.00"), "Hand-churned from curd."),
            ("Fresh Curd", ProductUnit.KG, Decimal("6.00"), "Set overnight."),
            ("Buttermilk", ProductUnit.LITER, Decimal("2.50"), "Lightly spiced chaas."),
            ("Paneer", ProductUnit.KG, Decimal("12.00"), ""),
        ]
        for name, unit, price, description in catalog:
            product, _ = Product.objects.get_or_create(
                name=name,
                defaults={
                    "unit": unit,
                    "price_per_unit": price,
                    "description": description,
                },
            )
            products.append(product)
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return products

    def _seed_orders(self, customers: list[Customer], products: list[Product]) -> int:
        self.stdout.write("Creating orders...")
        if not customers or not products:
            self.stdout.write(self.style.WARNING("Skipping orders (no customers/products)."))
            return 0
        if Order.objects.exists():
            self.stdout.write(self.style.WARNING("Orders already present, skipping."))
            return 0

        service = build_order_service()
        statuses = ["Pending", "Confirmed", "Processing", "Out for Delivery", "Delivered"]
        today = timezone.localdate()
        orders_created = 0

        for _ in range(20):
            customer = random.choice(customers)
            start = today + timedelta(days=random.randint(-10, 5))
            dto = CreateOrderDTO(
                customer_id=customer.id,
                order_date=start - timedelta(days=1),
                delivery_start=start,
                delivery_end=start + timedelta(days=random.randint(0, 29)),
                items=[
                    OrderItemDTO(
                        product_id=product.id,
                        quantity_per_day=random.randint(1, 3),
                    )
                    for product in random.sample(products, k=random.randint(1, 3))
                ],
                delivery_charge=Decimal(random.choice(["0", "5", "10"])),
                status=random.choice(statuses),
            )
            try:
                service.ensure_no_duplicate_items(dto)
            except DuplicateOrderItem:
                continue
            service.create_order(dto)
            orders_created += 1

        self.stdout.write(self.style.SUCCESS("Creating orders... Done!"))
        return orders_created
