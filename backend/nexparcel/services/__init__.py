# Services package init
"""
NexParcel Backend — Services Layer
====================================

What:  Business logic between routes (HTTP) and the database (persistence).
How:   Services are stateless; each call receives the request's session.

Service Inventory:
    - UserService:        accounts, roles, delivered-parcel counter
    - BookingService:     booking CRUD and the admin/requester/courier queries
    - ReviewService:      review inserts
    - StatisticsService:  home counters and the bookings-per-day chart
    - TokenService:       signs and verifies access tokens
    - PaymentProvider (abstract) / StripePaymentService: payment intents
    - PaymentService:     price → minor units → provider
"""
