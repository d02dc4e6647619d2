"""Certificate contract with roles, minting, verification, revocation and expiry."""