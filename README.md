# coursechain

Contracts for a learning platform, kept in memory. The package covers course
progress tracking, certificates that can be issued, verified and revoked,
certificates minted in batches, and a simple reward token. Every contract runs
on a shared `Ledger`. The ledger holds the current timestamp and checks that
callers are authorised. It also records the events that each contract
publishes.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command

```
coursechain
```

This runs a short demonstration. It registers the course "Rust Programming
Basics" with three modules and tries to mark it completed while one module is
still not started, which fails. It then completes that module and marks the
course completed again. This time it succeeds and a certificate is announced.
Each step is printed.

## Modules

- `coursechain.ledger`
  - `Ledger(timestamp=0)` is the environment shared by the contracts.
  - `generate_address()` returns a fresh `Address`.
  - `mock_all_auths()` authorises every address.
  - `mock_auths(addresses)` authorises only the addresses given.
  - `require_auth(address)` raises `AuthorizationError` if that address is not authorised.
  - `publish(topics, data)` appends an `Event` to `ledger.events`.
  - `ContractError` is the base class of every contract error. Its `code` attribute holds the error code.
- `coursechain.courses`
  - Holds `ModuleStatus`, `Module`, `Course` and `CourseRegistry`, plus `main`, the function behind the command.
  - `Course.calculate_progress()` returns the percentage of completed modules. For a course with no modules it returns NaN.
  - `Course.mark_course_completed()` returns whether the course could be marked completed. Every message it prints is also kept in `course.notices`.
- `coursechain.certificate.contract`
  - `CertificateContract` manages roles through `Role(can_issue, can_revoke)` and `Permission`. Granting, updating or revoking a role needs the admin's authorisation.
  - It mints certificates, identified by `bytes`, for users who hold the issue permission.
  - `verify_certificate` checks that a certificate exists, is not revoked and has not expired.
  - `revoke_certificate` is open to users who hold the revoke permission.
  - `track_certificates` and `add_user_certificate` manage the certificates listed under each user.
  - `is_valid_certificate` returns a `(valid, metadata)` pair.
  - An expiry date of `0` means the certificate never expires. A certificate that does not exist counts as expired.
- `coursechain.batch.contract`
  - `BatchCertificateContract` holds `CertificateData` items identified by integer ids. The admin adds and removes issuers, and issuers mint certificates one at a time or in batches.
  - `mint_batch_certificates` rejects the whole batch in three cases: the caller is not an issuer, the batch is larger than the configured maximum, or the owners and certificates differ in number.
  - Otherwise it returns one `MintResult(certificate_id, error)` per item, in order. `succeeded` is true when `error` is `None`.
  - Revoking a revocable certificate sets its `valid_until` to the current timestamp.
- `coursechain.progress`
  - `ProgressContract` registers courses with a number of modules, numbered from 1.
  - It records each user's completed modules. A module that is already completed cannot be completed again or marked incomplete.
  - It reports a whole-number completion percentage.
- `coursechain.tokens`
  - `TokenContract` supports minting by the admin, balances and transfers.
  - A balance cannot exceed the 128-bit signed range. Going past it raises `OverflowError`.

## Example

```python
from coursechain.ledger import Ledger
from coursechain.progress import ProgressContract

ledger = Ledger(timestamp=0)
ledger.mock_all_auths()
admin = ledger.generate_address()
student = ledger.generate_address()

progress = ProgressContract(ledger)
progress.initialize(admin)
progress.add_course("RUST101", 10)
progress.update_progress(student, "RUST101", 1, True)
progress.update_progress(student, "RUST101", 2, True)
print(progress.get_completion_percentage(student, "RUST101"))  # 20
```

When a contract rejects a call, it raises an exception that carries an error
code: `CertificateError`, `BatchError`, `ProgressError` or `TokenError`. Each
code is an `IntEnum` member. A caller who has not been authorised gets an
`AuthorizationError`.

## What it does not do

- State lives only in the Python objects. Nothing is saved to disk, and
  nothing talks to a network or a real ledger.
- Certificates issued by `CertificateContract` cannot be transferred. An event
  helper for transfers exists in `coursechain.certificate.events`, but no
  contract method uses it.
- The only command is the demonstration described above.