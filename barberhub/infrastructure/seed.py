"""Demo data for a freshly started store."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from barberhub.domain.schemas.appointment import AppointmentCreate
from barberhub.domain.schemas.barber import BarberCreate
from barberhub.domain.schemas.client import ClientCreate
from barberhub.domain.schemas.product import ProductCreate
from barberhub.domain.schemas.sale import SaleCreate
from barberhub.domain.schemas.service import ServiceCreate

if TYPE_CHECKING:
    from barberhub.infrastructure.store import BarbershopStore


INITIAL_BARBERS = [
    BarberCreate(
        name="Marcos Oliveira",
        position="Barbeiro Senior",
        phone="(11) 98765-4321",
        email="marcos@barberhub.com",
        specialty="Degradê",
        start_date="2022-01-01",
        about="Especialista em cortes modernos e degradês.",
    ),
    BarberCreate(
        name="Felipe Costa",
        position="Barbeiro Senior",
        phone="(11) 97654-3210",
        email="felipe@barberhub.com",
        specialty="Barba",
        start_date="2022-03-01",
        about="Especialista em designs de barba.",
    ),
    BarberCreate(
        name="Lucas Mendes",
        position="Barbeiro Pleno",
        phone="(11) 96543-2109",
        email="lucas@barberhub.com",
        specialty="Corte Social",
        start_date="2022-06-01",
        about="Especialista em cortes sociais e tradicionais.",
    ),
]

INITIAL_SERVICES = [
    ServiceCreate(name="Corte Degradê", description="Corte moderno com máquina e tesoura.", duration=30, price=40),
    ServiceCreate(name="Corte + Barba", description="Corte completo com barba.", duration=60, price=60),
    ServiceCreate(name="Barba", description="Aparar e modelar a barba.", duration=30, price=30),
    ServiceCreate(name="Corte Infantil", description="Corte para crianças até 12 anos.", duration=20, price=25),
    ServiceCreate(name="Pigmentação", description="Pigmentação para disfarçar falhas.", duration=45, price=50),
]

INITIAL_CLIENTS = [
    ClientCreate(
        name="João Silva",
        phone="(11) 98765-4321",
        email="joao@email.com",
        birthdate="1990-05-15",
        notes="Cliente regular, prefere corte degradê.",
    ),
    ClientCreate(
        name="Pedro Santos",
        phone="(11) 91234-5678",
        email="pedro@email.com",
        birthdate="1985-10-20",
        notes="Prefere ser atendido pelo Felipe.",
    ),
    ClientCreate(
        name="Rafael Gomes",
        phone="(11) 99876-5432",
        email="rafael@email.com",
        birthdate="1988-03-25",
        notes="Alérgico a alguns produtos.",
    ),
]

INITIAL_PRODUCTS = [
    ProductCreate(name="Pomada Modeladora", description="Pomada para estilizar o cabelo.", price=35, stock=20, category="Estilização"),
    ProductCreate(name="Óleo para Barba", description="Óleo hidratante para barba.", price=45, stock=15, category="Barba"),
    ProductCreate(name="Shampoo Especializado", description="Shampoo para cabelos masculinos.", price=30, stock=25, category="Higiene"),
]


def seed_store(store: BarbershopStore, today: date) -> None:
    """Insert the demo barbers, services, clients and products, plus
    three appointments and three sales dated ``today``."""
    day = today.isoformat()

    barbers = [store.barbers.create(b) for b in INITIAL_BARBERS]
    services = [store.services.create(s) for s in INITIAL_SERVICES]
    clients = [store.clients.create(c) for c in INITIAL_CLIENTS]
    products = [store.products.create(p) for p in INITIAL_PRODUCTS]

    appointments = [
        store.appointments.create(AppointmentCreate(
            client_id=clients[0].id, barber_id=barbers[0].id, service_id=services[1].id,
            date=day, time="10:30", status="confirmed", notes="",
        )),
        store.appointments.create(AppointmentCreate(
            client_id=clients[1].id, barber_id=barbers[1].id, service_id=services[0].id,
            date=day, time="13:00", status="waiting", notes="",
        )),
        store.appointments.create(AppointmentCreate(
            client_id=clients[2].id, barber_id=barbers[0].id, service_id=services[1].id,
            date=day, time="15:30", status="confirmed", notes="Cliente solicitou pigmentação também.",
        )),
    ]

    store.sales.create(SaleCreate(
        client_id=clients[0].id, product_id=products[0].id, quantity=1,
        total_price=35, date=day, payment_method="credit", notes="",
    ))
    store.sales.create(SaleCreate(
        client_id=clients[2].id, product_id=products[1].id, quantity=1,
        total_price=45, date=day, payment_method="cash", notes="",
    ))
    store.sales.create(SaleCreate(
        client_id=clients[0].id, appointment_id=appointments[0].id, quantity=1,
        total_price=60, date=day, payment_method="credit", notes="",
    ))
