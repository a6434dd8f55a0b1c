"""Core entity tables used by the repositories.

``scripts/generate_schema.py`` derives a full schema from the OpenAPI
document; this hand-curated subset is what the application runs against.
"""

SCHEMA_DDL = """
PRAGMA foreign_keys = ON;

-- ==========================================================================
-- Customers
-- ==========================================================================
CREATE TABLE IF NOT EXISTS customers (
    id                  TEXT PRIMARY KEY,
    name                TEXT NOT NULL,
    email               TEXT NOT NULL UNIQUE,
    address             TEXT NOT NULL DEFAULT '',
    phone_number        TEXT NOT NULL DEFAULT '',
    discount_percentage REAL DEFAULT 0.0,
    member_since        TEXT NOT NULL,
    status              TEXT NOT NULL DEFAULT 'Active'
                        CHECK(status IN ('Active','Inactive')),
    created_at          TEXT NOT NULL DEFAULT (datetime('now')),
    updated_at          TEXT NOT NULL DEFAULT (datetime('now'))
) WITHOUT ROWID;

CREATE INDEX IF NOT EXISTS idx_customers_status ON customers(status);
CREATE INDEX IF NOT EXISTS idx_customers_member_since ON customers(member_since);

-- ==========================================================================
-- Videos
-- ==========================================================================
CREATE TABLE IF NOT EXISTS videos (
    id                  TEXT PRIMARY KEY,
    title               TEXT NOT NULL UNIQUE,
    genre               TEXT NOT NULL,
    rating              TEXT NOT NULL,
    release_year        INTEGER NOT NULL,
    duration            INTEGER NOT NULL,
    description         TEXT,
    director            TEXT,
    rental_price        REAL NOT NULL DEFAULT 3.99,
    available_copies    INTEGER NOT NULL DEFAULT 0,
    total_copies        INTEGER NOT NULL DEFAULT 0,
    created_at          TEXT NOT NULL DEFAULT (datetime('now')),
    updated_at          TEXT NOT NULL DEFAULT (datetime('now'))
) WITHOUT ROWID;

CREATE INDEX IF NOT EXISTS idx_videos_genre ON videos(genre);
CREATE INDEX IF NOT EXISTS idx_videos_rating ON videos(rating);
CREATE INDEX IF NOT EXISTS idx_videos_rental_price ON videos(rental_price);

-- ==========================================================================
-- Inventory (physical copies)
-- ==========================================================================
CREATE TABLE IF NOT EXISTS inventory (
    id                  TEXT PRIMARY KEY,
    video_id            TEXT NOT NULL REFERENCES videos(id),
    copy_id             TEXT NOT NULL,
    condition           TEXT NOT NULL DEFAULT 'Good'
                        CHECK(condition IN ('New','Good','Fair','Poor','Damaged')),
    status              TEXT NOT NULL DEFAULT 'Available'
                        CHECK(status IN ('Available','Rented','Maintenance','Lost')),
    date_acquired       TEXT NOT NULL,
    last_rented_date    TEXT,
    created_at          TEXT NOT NULL DEFAULT (datetime('now')),
    updated_at          TEXT NOT NULL DEFAULT (datetime('now'))
) WITHOUT ROWID;

CREATE INDEX IF NOT EXISTS idx_inventory_video_id ON inventory(video_id);
CREATE INDEX IF NOT EXISTS idx_inventory_status ON inventory(status);
CREATE INDEX IF NOT EXISTS idx_inventory_condition ON inventory(condition);

-- ==========================================================================
-- Rentals
-- ==========================================================================
CREATE TABLE IF NOT EXISTS rentals (
    id                  TEXT PRIMARY KEY,
    customer_id         TEXT NOT NULL REFERENCES customers(id),
    video_id            TEXT NOT NULL REFERENCES videos(id),
    inventory_id        TEXT NOT NULL REFERENCES inventory(id),
    rental_date         TEXT NOT NULL,
    due_date            TEXT NOT NULL,
    return_date         TEXT,
    rental_fee          REAL NOT NULL,
    late_fee            REAL DEFAULT 0.0,
    currency            TEXT NOT NULL DEFAULT 'USD',
    status              TEXT NOT NULL DEFAULT 'Active'
                        CHECK(status IN ('Active','Returned','Overdue','Cancelled')),
    created_at          TEXT NOT NULL DEFAULT (datetime('now')),
    updated_at          TEXT NOT NULL DEFAULT (datetime('now'))
) WITHOUT ROWID;

CREATE INDEX IF NOT EXISTS idx_rentals_customer_id ON rentals(customer_id);
CREATE INDEX IF NOT EXISTS idx_rentals_video_id ON rentals(video_id);
CREATE INDEX IF NOT EXISTS idx_rentals_inventory_id ON rentals(inventory_id);
CREATE INDEX IF NOT EXISTS idx_rentals_status ON rentals(status);
CREATE INDEX IF NOT EXISTS idx_rentals_due_date ON rentals(due_date);

-- ==========================================================================
-- Payments
-- ==========================================================================
CREATE TABLE IF NOT EXISTS payments (
    id                  TEXT PRIMARY KEY,
    customer_id         TEXT NOT NULL REFERENCES customers(id),
    rental_id           TEXT REFERENCES rentals(id),
    amount              REAL NOT NULL,
    currency            TEXT NOT NULL DEFAULT 'USD',
    payment_type        TEXT NOT NULL
                        CHECK(payment_type IN ('Rental','LateFee','Deposit','Refund')),
    payment_method      TEXT NOT NULL
                        CHECK(payment_method IN ('Cash','CreditCard','DebitCard','Online')),
    payment_date        TEXT NOT NULL,
    reference_number    TEXT,
    status              TEXT NOT NULL DEFAULT 'Pending'
                        CHECK(status IN ('Pending','Completed','Failed','Refunded')),
    created_at          TEXT NOT NULL DEFAULT (datetime('now')),
    updated_at          TEXT NOT NULL DEFAULT (datetime('now'))
) WITHOUT ROWID;

CREATE INDEX IF NOT EXISTS idx_payments_customer_id ON payments(customer_id);
CREATE INDEX IF NOT EXISTS idx_payments_rental_id ON payments(rental_id);
CREATE INDEX IF NOT EXISTS idx_payments_status ON payments(status);
CREATE INDEX IF NOT EXISTS idx_payments_payment_type ON payments(payment_type);
CREATE INDEX IF NOT EXISTS idx_payments_payment_date ON payments(payment_date);
"""
