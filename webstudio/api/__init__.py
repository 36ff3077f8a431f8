"""
API Package — Data Contracts and Form Validation
================================================

Pydantic contracts shared between the request layer (outside this package)
and the data access layer.

Contents
--------
- models
    Create-time shapes (``InsertUser``, ``InsertQuote``, ``InsertProject``,
    ``InsertReview``, ``InsertPaymentCode``, ``InsertPayment``,
    ``InsertSubscription``, ``InsertMonthlyReport``, ``InsertChatMessage``),
    partial updates (``UserUpdate``, ``ProjectUpdate``), status literals and
    read shapes for composite results (``ReviewWithUser``, ``SubscriptionWithUser``).

- forms
    Web form schemas: the five quote wizard steps, ``ReviewForm`` and
    ``PaymentCodeForm``, plus ``validate_form`` / ``FormValidationError``
    with per-field Portuguese messages.
"""
